from scoreboard.main import main

raise SystemExit(main())
