from setuptools import setup, find_packages

setup(
    name="cycmodel",
    version="0.1",
    description="Stoichiometric network reconstruction from BioCyc pathway/genome databases for the COBRApy framework",
    long_description=("Builds elementally balanced, compartmentalized reaction networks from the reaction records of "
                      "BioCyc/EcoCyc style pathway/genome databases: instantiation of generic reactions, compartment "
                      "resolution, passive diffusion and exchange reactions, and export to COBRApy models and SBML"),
    long_description_content_type="text/plain",
    license="Apache License 2.0",
    python_requires=">=3.7",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=["cobra", "numpy", "scipy"],
    extras_require={"test": ["pytest"]},
    classifiers=[
        "Intended Audience :: Science/Research", "Development Status :: 3 - Alpha", "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10", "Programming Language :: Python :: 3.11", "Programming Language :: Python :: 3.12",
        "Natural Language :: English", "Operating System :: OS Independent", "Topic :: Scientific/Engineering :: Bio-Informatics"
    ],
    keywords=["metabolism", "constraint-based", "genome-scale model", "BioCyc", "SBML"],
    zip_safe=False,
)
