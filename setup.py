from setuptools import find_packages, setup


setup(
    name="shape-program",
    version="0.1.0",
    description="Area and perimeter of circles and rectangles behind a shared Shape interface.",
    package_dir={"": "src"},
    packages=find_packages("src"),
    include_package_data=True,
    install_requires=[],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "shape-program=shape_program.cli:main",
        ],
    },
    python_requires=">=3.10",
)
