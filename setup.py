import os

from setuptools import setup, find_packages

version_file = os.path.join(
    os.path.dirname(__file__),
    "mp_rational",
    "version.py",
)
with open(version_file, "r") as f:
    exec(f.read())

readme_file = os.path.join(os.path.dirname(__file__), 'README.md')
with open(readme_file, "r") as f:
    long_description = f.read()

setup(
    name="mp_rational",
    version=__version__,
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    author="mp_rational developers",
    description="Exact rational numbers over pluggable arbitrary-precision integer backends.",
    long_description=long_description,
    long_description_content_type='text/markdown',
    license="BSL-1.0",
    classifiers=[
        "Development Status :: 4 - Beta",

        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",

        "Operating System :: POSIX :: Linux",
        "Operating System :: Microsoft :: Windows",
        "Operating System :: MacOS",

        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering :: Mathematics",
    ],
    keywords="rational fraction bignum gmp multiprecision exact-arithmetic",
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "gmpy2",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points = {
        "console_scripts": [
            "mp-rational-eval=mp_rational.scripts.mp_rational_eval:main",
        ],
    },
)
