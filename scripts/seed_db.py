"""Load the bundled clubs and players into the configured database.

Usage (from repo root):
python3 scripts/seed_db.py

Tables are created first when missing. Clubs and players are only inserted
into empty tables, so the script can be re-run safely.
"""

import os
import sys

# ensure repo root is on path
HERE = os.path.dirname(os.path.dirname(__file__))
if HERE not in sys.path:
    sys.path.insert(0, HERE)

from champions import create_app

app = create_app({"SEED_DATA": False})

if __name__ == "__main__":
    app.init_db()
    inserted = app.seed_db()
    print(f"Seeded {inserted['clubs']} clubs and {inserted['players']} players.")
