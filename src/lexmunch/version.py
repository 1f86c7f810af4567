from importlib.metadata import PackageNotFoundError, version

try:
    version = version("LexMunch")
except PackageNotFoundError:
    version = "0.0.0"
