from lol_counters.main import main

raise SystemExit(main())
