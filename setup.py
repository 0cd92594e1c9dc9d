from setuptools import setup, find_packages
import os

install_requires = ["lark>=1.1", "pydantic>=2.0"]

# Define optional dependencies for development
extras_require = {"dev": ["pytest"]}

setup(
    name="tfi-compiler",
    version="1.0.0",
    packages=find_packages(where=".", exclude=["tests", "tests.*"]),
    install_requires=install_requires,
    extras_require=extras_require,
    python_requires=">=3.9",
    entry_points={
        "console_scripts": [
            "tfic = tfic.cli:main",
        ],
    },
    include_package_data=True,
    package_data={"tfic.parser": ["*.lark"]},
    description="A compiler from the TFI scripting language to JavaScript.",
    long_description=open("README.md").read() if os.path.exists("README.md") else "",
    long_description_content_type="text/markdown",
)
