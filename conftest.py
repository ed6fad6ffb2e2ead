# encoding: utf-8

"""Put the repository root on sys.path, twister has no __init__.py."""
