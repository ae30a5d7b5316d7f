"""Settings package.

`base` holds everything shared, `dev` and `test` override it per environment.
"""
