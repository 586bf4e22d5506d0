from setuptools import setup, find_packages

setup(
    name="hdseq",
    version="0.1.0",
    description="Hyperdimensional computing for symbol sequence classification",
    author="hdseq Authors",
    python_requires=">=3.8",
    packages=find_packages(include=["hdseq", "hdseq.*"]),
    install_requires=[
        "numpy>=1.21.0",
        "scikit-learn>=1.0.0",
        "matplotlib>=3.5.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Topic :: Scientific/Engineering :: Artificial Intelligence",
    ],
)
