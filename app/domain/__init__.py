"""
Domain layer: dataclass models, repository interfaces, field-name constants
and the exception taxonomy. Nothing here imports FastAPI or the Mongo driver.
"""
