from setuptools import setup, find_packages


setup(
    name="erc7930",
    version="0.1.0",
    description="ERC-7930 interoperable address codec",
    long_description=open('README.md').read(),
    long_description_content_type="text/markdown",
    license="MIT",
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Programming Language :: Python :: 3.13',
    ],
    packages=find_packages(where=".", exclude=["tests"]),
    python_requires=">=3.10, <4",
    install_requires=["pycryptodome>=3.10"],
    extras_require={
        "test": ["pytest", "pytest-asyncio"],
    },
    entry_points={
        "console_scripts": ["erc7930=erc7930.__main__:main"],
    },
)
