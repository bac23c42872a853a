import os
import tempfile
from pathlib import Path

# Must be set before db.py is imported anywhere
_DB_DIR = Path(tempfile.mkdtemp(prefix="mathcat-tests-"))
os.environ["DATABASE_URL"] = f"sqlite:///{_DB_DIR / 'test.db'}"

from db import init_db  # noqa: E402

init_db()
