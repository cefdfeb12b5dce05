import setuptools

with open("README.md", "r") as f:
    long_description = f.read()
with open("requirements.txt", "r") as f:
    requirements = [line.strip() for line in f if line.strip()]

setuptools.setup(
    name="os_gridref",
    version="0.1.0",
    author="CSE",
    description="Convert between OS National Grid references and OSGB36 latitude/longitude",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(include=["os_gridref", "os_gridref.*"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.7',
    install_requires=requirements,
    extras_require={"test": ["pytest"]},
    entry_points={
        "console_scripts": ["os-gridref=os_gridref.cli:main"],
    },
)
