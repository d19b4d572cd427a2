from tempmap.plt import main

raise SystemExit(main())
