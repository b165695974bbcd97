from setuptools import setup, find_packages

setup(
    name="ecarith_package",
    version="0.1.0",
    description="Point arithmetic on elliptic curves over prime fields",
    url="https://github.com/yourusername/ecarith_package",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    extras_require={
        "test": [
            "pytest",
            "cryptography",
            "tx-engine",
        ],
    },
    entry_points={
        "console_scripts": ["ecarith=ecarith.__main__:main"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.11",
)
