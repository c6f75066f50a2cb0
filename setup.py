from setuptools import setup, find_packages
import re
from pathlib import Path

_version_re = re.compile(r"^__version__\s*(?::\s*\w+\[?\w*\]?)?\s*=\s*['\"]([^'\"]+)['\"]", re.M)


def file_getVersion(rel_path: str) -> str:
    """
    Retrieve the version string from the specified file.
    """
    version_file = Path(rel_path)
    if not version_file.exists():
        raise RuntimeError(f"Version file {rel_path} not found.")

    with open(version_file, 'r') as f:
        content = f.read()
        match = _version_re.search(content)
        if not match:
            raise RuntimeError(f"Could not find __version__ in {rel_path}")
        return match.group(1)


setup(
    name='clinput',
    version=file_getVersion('clinput/__init__.py'),
    description='Classify command line tokens into flags, options and parameters',
    author='FNNDSC',
    author_email='rudolph.pienaar@childrens.harvard.edu',
    packages=find_packages(include=['clinput', 'clinput.*']),
    python_requires='>=3.11',
    install_requires=[
        'click',
        'loguru',
        'pydantic>=2',
        'pydantic-settings',
        'rich',
    ],
    license='MIT',
    entry_points={
        'console_scripts': [
            'clinput = clinput.main:main'
        ]
    },
    classifiers=[
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Environment :: Console',
    ],
    extras_require={
        'none': [],
        'dev': [
            'pytest~=8.0'
        ]
    }
)
