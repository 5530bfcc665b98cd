from setuptools import setup

setup(
    name="wktspec",
    version="0.1.0",
    description="Read and write Well-Known Text geometry",
    license="BSD",
    packages=["wktspec"],
    package_data={"wktspec": ["py.typed"]},
    python_requires=">=3.9",
    install_requires=["msgspec"],
    extras_require={"test": ["pytest"]},
)
