from setuptools import setup, find_packages

setup(
    name="gift_grid_planner",
    version="0.1.0",
    packages=find_packages(include=["gridcore", "gridcore.*", "gridconfig", "gridconfig.*", "desktop_ui", "desktop_ui.*"]),
    py_modules=["main"],
    install_requires=[
        "requests>=2.31.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "desktop": ["PySide6>=6.6"],
        "test": ["pytest>=7.4", "pytest-asyncio>=0.23"],
    },
    python_requires=">=3.10",
)
