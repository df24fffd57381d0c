"""
Account Service root package.

Registration, credential login, profile management and OTP-based password
recovery behind a FastAPI app (main.py). Domain logic lives in ``domain`` and
``application``; MongoDB, bcrypt and SMTP bindings live in ``infrastructure``
and ``core``.
"""
