from __future__ import annotations

from asmintr.cli import main

raise SystemExit(main())
