import sys
from pathlib import Path

# Add repository root to Python path for config, libs and src access
repo_root = Path(__file__).parent.parent
sys.path.insert(0, str(repo_root))

from config import ApplicationConfig

# Minimum bcrypt cost keeps the suite fast; hashing behaviour is unchanged
ApplicationConfig.BCRYPT_ROUNDS = 4
