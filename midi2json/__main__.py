from midi2json.cli import main

raise SystemExit(main())
