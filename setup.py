from setuptools import setup, find_packages

setup(
    name="raur",
    version="0.1.0",
    description="raur: AUR + Pacman helper",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=["rich", "requests"],
    extras_require={"test": ["pytest"]},
    entry_points={
        "console_scripts": [
            "raur=raur.cli:main",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: POSIX :: Linux",
    ],
)
