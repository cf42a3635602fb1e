"""Module entrypoint.

Allows:
    python -m prometheus_wire
"""

from __future__ import annotations

from prometheus_wire.server.exposition_server import main

if __name__ == "__main__":
    main()
