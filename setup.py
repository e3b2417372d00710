#!/usr/bin/env python
from setuptools import find_packages, setup

setup(
    name="psd-layers",
    version="0.1.0",
    description="Decode layered Photoshop PSD files into canvas-sized pixel layers",
    license="MIT",
    package_dir={"": "src"},
    packages=find_packages("src"),
    python_requires=">=3.9",
    install_requires=[
        "attrs>=23.0.0",
        "numpy",
        "Pillow>=10.3.0",
    ],
    extras_require={
        "tests": ["pytest"],
    },
    entry_points={
        "console_scripts": ["psd-layers=psd_layers.__main__:main"],
    },
)
