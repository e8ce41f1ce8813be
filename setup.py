# setup.py
from setuptools import setup, find_packages

setup(
    name="wavefront3d",
    version="1.0.0",
    description="Wavefront OBJ/MTL loader producing GPU-ready indexed meshes",
    packages=find_packages(include=["wavefront3d", "wavefront3d.*"]),
    python_requires=">=3.10",
    install_requires=[
        "numpy>=1.20.0",
        "Pillow>=9.0.0",
        "numba>=0.55.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
