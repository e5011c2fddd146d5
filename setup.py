from setuptools import setup, find_packages

setup(
    name="keybaseid",
    version="1.0.0",
    description="Keybase identity trust scoring and Saltpack signed-message authentication",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=["httpx>=0.24"],
    extras_require={"dev": ["pytest>=7.0", "pytest-asyncio>=0.21", "respx>=0.20"]},
    entry_points={"console_scripts": ["keybaseid=keybaseid.cli:run"]},
    python_requires=">=3.9",
    license="CC0-1.0",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: Security :: Cryptography",
        "Topic :: Software Development :: Libraries",
        "License :: CC0 1.0 Universal (CC0 1.0) Public Domain Dedication",
        "Programming Language :: Python :: 3",
    ],
    keywords="keybase identity trust reputation saltpack authentication",
)
