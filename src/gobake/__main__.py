from gobake.cli import main

raise SystemExit(main())
