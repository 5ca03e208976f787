from swarmfield.entities.objects.static import StaticObstacle

__all__ = ["StaticObstacle"]
