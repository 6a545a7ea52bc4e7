"""Helper to initialize the database schema using SQLAlchemy models.

Usage (from repo root):
python3 scripts/init_db.py

This will import the Flask app factory and call app.init_db() which uses SQLAlchemy
models defined in champions/models.py to create tables. Use alembic
(``alembic upgrade head``) instead for databases managed by migrations.
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
    print(f"Initializing DB at {app.config['DATABASE_URL']} (tables defined in champions.models)")
    app.init_db()
    print("Done.")
