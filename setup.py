from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="streetwidth",
    version="0.1.0",
    author="",
    author_email="",
    description="Width parsing and formatting for street segment editors",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*", "scripts", "scripts.*"]),
    include_package_data=True,
    package_data={
        'streetwidth.widths': ['data/*.yaml'],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8",
    install_requires=[
        "pandas>=1.3.0",
        "PyYAML>=5.4",
        "Babel>=2.9.0",
    ],
    extras_require={
        "dev": ["pytest>=7.0.0"],
    },
)
