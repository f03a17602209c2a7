from rest_framework import permissions


class IsPubCreatorOrStaff(permissions.BasePermission):
    """
    Permission: Only the user who added a pub (or staff) can edit it.
    Anyone can read pubs.
    """

    message = 'You can only update pubs you added.'

    def has_object_permission(self, request, view, obj):
        if request.method in permissions.SAFE_METHODS:
            return True

        if request.user and request.user.is_staff:
            return True

        return obj.created_by_id is not None and obj.created_by_id == request.user.id
