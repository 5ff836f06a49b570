# Purpose: Rendering engines. Concrete engines are imported lazily by the factory.


from .base import EngineFactory, EnginePool, RenderEngine, get_render_engine

__all__ = ["EngineFactory", "EnginePool", "RenderEngine", "get_render_engine"]
