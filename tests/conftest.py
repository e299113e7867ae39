"""
Pytest configuration to ensure the flat project modules are importable.

Prepends the project root to sys.path so `import job_database` works when
tests run without an installed package.
"""
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]

project_root_str = str(PROJECT_ROOT)
if project_root_str not in sys.path:
    sys.path.insert(0, project_root_str)
