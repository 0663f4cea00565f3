from segment_clip.cli import main

raise SystemExit(main())
