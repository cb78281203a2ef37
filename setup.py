from setuptools import find_namespace_packages, setup

with open("README.rst", "r", encoding='utf-8') as fh:
    long_description = fh.read()

setup(
    name="arclet-resulttree",
    version="0.1.0",
    author="RF-Tar-Railt",
    author_email="rf_tar_railt@qq.com",
    description="Parse-result tree for command line arguments parsers: arity capacity, default values and allowed-value diagnostics.",
    license='MIT',
    long_description=long_description,
    long_description_content_type="text/x-rst",
    url="https://github.com/ArcletProject/Alconna",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src"),
    package_data={"arclet.resulttree": ["i18n/*.json", "i18n/.*.json"]},
    install_requires=["typing-extensions>=4.4", "tarina>=0.7"],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Operating System :: OS Independent",
    ],
    include_package_data=True,
    keywords=['command', 'argparse', 'cli', 'parsing', 'parse-result', 'command-line', 'parser'],
    python_requires='>=3.8',
    project_urls={
        'Bug Reports': 'https://github.com/ArcletProject/Alconna/issues',
        'Source': 'https://github.com/ArcletProject/Alconna',
    },
)
