import setuptools

setuptools.setup(
    name="resumable_generators",
    version="0.0.0",
    description="Generators written as sequential functions, resumed through a private yield capability",
    packages=["resumable_generators"],
    install_requires=["greenlet"],
    python_requires=">=3.8",
)
