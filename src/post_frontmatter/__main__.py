from post_frontmatter.cli import main

raise SystemExit(main())
