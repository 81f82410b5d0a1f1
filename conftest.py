"""
Root conftest - shared pytest configuration.
Ensures user_backend package is discoverable when running pytest from the repo root.
"""
import os
import sys
from pathlib import Path

# Ensure repo root is in path for 'from user_backend...' imports
_root = Path(__file__).resolve().parent
if str(_root) not in sys.path:
    sys.path.insert(0, str(_root))

# Cheap bcrypt hashing for tests; read when settings are first created
os.environ.setdefault("BCRYPT_ROUNDS", "4")
