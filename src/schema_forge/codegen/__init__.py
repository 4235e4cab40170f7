from .entity_generator import CodeArtifact, EntityCodeGenerator, GenerationContext

__all__ = ["CodeArtifact", "EntityCodeGenerator", "GenerationContext"]
