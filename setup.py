# setup.py
from setuptools import find_namespace_packages, setup

setup(
    name="treegen",
    version="0.1.0",
    description="Generate directory and file structures from a compact description",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["treegen", "treegen.*"]),
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        'console_scripts': [
            'treegen=treegen.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
