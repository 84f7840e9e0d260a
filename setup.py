# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="folderforge",
    version="0.1.0",
    description="Create directory structures from tree diagrams, mappings and path lists",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["folderforge*"]),
    python_requires=">=3.9",
    install_requires=[
        "PyYAML",  # YAML input for the structured formats
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'folderforge=folderforge.interface.cli.app:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
