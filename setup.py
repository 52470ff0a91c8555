from re import search
from setuptools import setup, find_packages

with open("src/groupings/version.py") as version_file:
    version = search('version = "(.*)"', version_file.read()).group(1)

with open("README.md") as readme_file:
    readme = readme_file.read()

setup(
    name="groupings",
    version=version,
    description="Grouping of sequences into ordered buckets by a derived key,"
    " with pluggable key equality.",
    long_description=readme,
    long_description_content_type="text/markdown",
    keywords="grouping group-by bucketing",
    license="MIT license",
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Libraries",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    install_requires=[],
    extras_require={
        "test": [
            "pytest>=7",
            "pytest-describe>=2",
            "pytest-benchmark>=4",
        ],
    },
    python_requires=">=3.9,<4",
    packages=find_packages("src"),
    package_dir={"": "src"},
    # PEP-561: https://www.python.org/dev/peps/pep-0561/
    package_data={"groupings": ["py.typed"]},
    include_package_data=True,
    zip_safe=False,
)
