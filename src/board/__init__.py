"""
Community board domain layer.

Resource schemas, record types, the remote resource client, and the pure
state controllers (list view, form, carousel) that the Flask views drive.
"""
