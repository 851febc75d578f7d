import os

from setuptools import find_packages, setup

_HERE = os.path.dirname(os.path.abspath(__file__))

about: dict = {}
with open(os.path.join(_HERE, "src", "rlpxcrypto", "__about__.py")) as f:
    exec(f.read(), about)

if __name__ == "__main__":
    setup(
        name="rlpxcrypto",
        version=about["__version__"],
        description="RLPx handshake crypto: ECDH-X, Concat-KDF, ECIES, recoverable ECDSA",
        packages=find_packages(where="src"),
        package_dir={"": "src"},
        python_requires=">=3.9",
        install_requires=["cryptography>=41"],
        extras_require={"test": ["pytest>=7"]},
        entry_points={"console_scripts": ["rlpxcrypto=rlpxcrypto.__main__:main"]},
    )
