"""
Pytest configuration for Monkey tests.
"""
import sys
import os
import tempfile

import pytest

# Ensure `import monkey` works without installing the package
_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
_SRC_DIR = os.path.join(_ROOT, 'src')

if _SRC_DIR not in sys.path:
    sys.path.insert(0, _SRC_DIR)

# Keep the user's real ~/.monkey/config.json out of the test run. This has
# to happen before monkey.config is first imported.
os.environ["MONKEY_CONFIG"] = os.path.join(tempfile.mkdtemp(prefix="monkey-tests-"), "config.json")
os.environ.pop("MONKEY_DEBUG", None)


@pytest.fixture(autouse=True)
def _fresh_config():
    from monkey.config import config
    config.reset()
    yield
    config.reset()
