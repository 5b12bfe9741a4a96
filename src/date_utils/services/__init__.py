"""Service layer — date operations returning DateResult.

Services may import from the domain layer and from config.
The domain layer never imports from here.
"""
