from setuptools import find_packages, setup

setup(
    name="exif-sidecar",
    version="0.1.0",
    description="將 JPEG 檔案的 EXIF 與檔案資訊輸出為 JSON sidecar",
    package_dir={"": "src"},
    packages=find_packages("src"),
    python_requires=">=3.10",
    install_requires=[
        "Pillow>=9.0",
        "piexif>=1.1.3",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "exif-sidecar=exif_sidecar.main:main",
        ],
    },
)
