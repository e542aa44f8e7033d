from setuptools import setup, find_packages

setup(
    name="cardline",
    version="0.1.0",
    description="Frame-diffing terminal renderer and animation scheduler for a card table",
    packages=find_packages(include=["cardline", "cardline.*"]),
    install_requires=[
        "rich",
        "prompt-toolkit",
    ],
    extras_require={
        "test": ["pytest", "pytest-asyncio"],
    },
    python_requires=">=3.11",
)
