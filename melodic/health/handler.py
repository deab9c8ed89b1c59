"""
Health Handler
Liveness check.
"""

# Python Packages
from flask_restx import Namespace, Resource

# Namespace
health_namespace = Namespace("health", path = "/health", description = "Liveness check")





@health_namespace.route("")
class Health(Resource):

    def get(self):
        return {"status": "healthy"}, 200
