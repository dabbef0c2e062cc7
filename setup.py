from setuptools import setup

setup(
    name="indexed-heap",
    version="0.1.0",
    description="Array-backed binary heap with a value-to-slot position index",
    py_modules=["indexed_heap"],
    install_requires=["numpy"],
    python_requires=">=3.7",
)
