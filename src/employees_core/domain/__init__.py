"""Domain layer - Core business logic, entities, and rules.

This layer contains:
- Value Objects: Immutable, self-validating wrappers (RegistrationId, MonetaryAmount)
- Entities: Objects with identity (Employee)
- Results: Ok/Err values returned instead of raising on invalid input
- Domain Exceptions: Business rule violations surfaced at the application boundary

The domain layer has NO dependencies on external frameworks or infrastructure.
"""
