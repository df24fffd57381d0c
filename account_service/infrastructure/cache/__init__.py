from .in_memory_otp_registry import InMemoryOtpRegistry, generate_otp

__all__ = ["InMemoryOtpRegistry", "generate_otp"]
