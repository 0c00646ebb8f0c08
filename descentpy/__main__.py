from descentpy.cli import main

raise SystemExit(main())
