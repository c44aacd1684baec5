from revolver.services.notebook import Notebook, SearchResults

__all__ = ["Notebook", "SearchResults"]
