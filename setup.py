from setuptools import setup

with open("README.md", "r") as fh:
    long_description = fh.read()

setup(
    name             = "pymetardecoder",
    version          = "0.1.0",
    description      = "Python module to decode METAR/SPECI aviation weather reports",
    long_description = long_description,
    long_description_content_type = "text/markdown",
    license          = "LGPL-2.1-or-later",
    packages         = [
        "pymetardecoder",
        "pymetardecoder.metar"
    ],
    python_requires  = ">=3.6",
    extras_require   = {
        "test": ["pytest"]
    },
    classifiers = [
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Atmospheric Science",
        "Programming Language :: Python :: 3"
    ]
)
