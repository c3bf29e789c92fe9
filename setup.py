"""Setup script for notasapp project."""

from setuptools import setup, find_packages
import os

# Read version from __init__.py
def get_version():
    init_file = os.path.join(os.path.dirname(__file__), 'src', 'notasapp', '__init__.py')
    with open(init_file, 'r') as f:
        for line in f:
            if line.startswith('__version__'):
                return line.split('=')[1].strip().strip('"').strip("'")
    raise RuntimeError('Unable to find version string.')

setup(
    name="notasapp",
    version=get_version(),
    description="Login and grade validation with average and pass/fail scoring",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.8",
    install_requires=[
        "pyyaml>=5.4.1",
    ],
    extras_require={
        "dev": [
            "pytest",
        ]
    },
    entry_points={
        "console_scripts": [
            "notasapp=notasapp.notasapp:main",
        ],
    },
)
