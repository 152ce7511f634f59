# setup.py
from setuptools import setup, find_packages

setup(
    name="pixelspace",
    version="1.0.0",
    description="Mutable 3-D vectors for point-cloud (pixel/LED) transforms",
    packages=find_packages(include=["pixelspace", "pixelspace.*"]),
    install_requires=[
        "numpy>=1.20.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
