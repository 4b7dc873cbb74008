"""Application layer - Use cases and port definitions.

This layer contains:
- Use Cases: Register an employee, adjust a salary, dismiss an employee
- Ports: Abstract interfaces for persistence and time
- DTOs: Primitive-only views of entities for delivery mechanisms

The application layer depends only on the domain layer. Validation results
returned by the domain are unwrapped here, so callers see DomainException
subclasses they can map to HTTP status codes.
"""
