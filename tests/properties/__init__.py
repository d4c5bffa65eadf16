from properties.generators import (
    GeneratorConfig,
    GeneratorMode,
    ByteSequenceGenerator,
    SimilarSequenceGenerator,
    EdgeCaseGenerator,
    TestCaseGenerator,
    DiffTestCase,
    generate_test_cases
)


__all__ = [
    "GeneratorConfig",
    "GeneratorMode",
    "ByteSequenceGenerator",
    "SimilarSequenceGenerator",
    "EdgeCaseGenerator",
    "TestCaseGenerator",
    "DiffTestCase",
    "generate_test_cases"
]
