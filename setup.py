# -*- coding: utf-8 -*-
import setuptools

if __name__ == "__main__":
    setuptools.setup(
        name="retrofield",
        version="0.2.0",
        description="Retrofield: typed decoding of Retrosheet event fields",
        packages=setuptools.find_packages(exclude=["tests"]),
        python_requires=">=3.8",
        install_requires=["pandas", "click"],
        extras_require={"dev": ["pytest", "black"]},
        scripts=["bin/retrofield"],
    )
