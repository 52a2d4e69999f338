from tmdb_data_provider.cli import main

raise SystemExit(main())
