from puzzle_toolkit.cli import main

raise SystemExit(main())
