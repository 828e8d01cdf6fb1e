from mindmap_bot.cli import main

raise SystemExit(main())
