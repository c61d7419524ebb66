"""Allow running the duel with ``python -m wizard_duel``."""

from __future__ import annotations

from wizard_duel.main import main


raise SystemExit(main())
