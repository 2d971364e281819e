"""Public API for secure API filters.

Declare filters on a model once, then narrow querysets with untrusted,
string-typed input::

    from secure_api_filters import api

    api.declare_attribute_filters(Student, "first_name", "age")
    students = api.apply_filters(Student.objects.all(), request.GET, {"current_user": request.user})
"""

from secure_api_filters.api.filters import *
