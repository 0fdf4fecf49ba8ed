"""
Service layer.

``UserStore`` owns every user record and all validation rules.  Route
handlers only translate between HTTP and store calls.
"""
