from cmdbuild.cli import main

raise SystemExit(main())
