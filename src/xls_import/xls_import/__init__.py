"""XLS attendance import package.

Organized by feature modules (employees, attendance, shifts, imports,
reports, exports) with a thin Flask controller layer over service and
repository layers.
"""
