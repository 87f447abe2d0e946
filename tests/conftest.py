import os
import sys

# Add the project root to the path so the tests run without an install
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))
