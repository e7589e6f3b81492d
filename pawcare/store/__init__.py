from .entity_store import EntityStore, StoreChange, ChangeAction

__all__ = ['EntityStore', 'StoreChange', 'ChangeAction']
