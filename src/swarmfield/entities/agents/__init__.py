from swarmfield.entities.agents.actor import Actor

__all__ = ["Actor"]
