from tick_chart.app import main

raise SystemExit(main())
