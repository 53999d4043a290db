from setuptools import setup, find_packages
setup(
    name="tx_tax_auctions",
    version="0.1.0",
    package_dir={"": "src"},
    packages=find_packages("src"),
    include_package_data=True,
    python_requires=">=3.8",
    install_requires=[
        "parsel",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'tx-tax-auctions=tx_tax_auctions.__main__:main'
        ]
    }
)
