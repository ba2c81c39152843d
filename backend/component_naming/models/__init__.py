"""
Application manifest models
"""
from component_naming.models.application import (Application,  # noqa: F401
                                                 ApplicationComponent,
                                                 ApplicationSpec, ObjectMeta)
