from pathlib import Path
from setuptools import setup

root = Path(__file__).parent
version_text = root.joinpath('src', 'lazyholder', 'version.py').read_text()
version = version_text.split('VERSION = ', 1)[-1].strip().replace('-', '').replace("'", '')

# Dependencies are declared in pyproject.toml
setup(version=version)
