from setuptools import setup, find_packages

setup(
    name="archie",
    version="3.3.0",
    description="Archie: interactive package management frontend for Arch Linux",
    author="Gurov",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=["rich"],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "archie=archie.cli:main",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: POSIX :: Linux",
        "Environment :: Console",
    ],
)
