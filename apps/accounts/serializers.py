from rest_framework import serializers
from django.contrib.auth.password_validation import validate_password
from .models import User


class UserSerializer(serializers.ModelSerializer):
    """Basic user serializer for profile display."""

    profilePicture = serializers.CharField(source='profile_picture', read_only=True, allow_null=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = User
        fields = [
            'id',
            'username',
            'email',
            'profilePicture',
            'createdAt',
        ]
        read_only_fields = fields


class UserPublicSerializer(serializers.ModelSerializer):
    """Public user info (for displaying next to ratings and photos)."""

    profilePicture = serializers.CharField(source='profile_picture', read_only=True, allow_null=True)

    class Meta:
        model = User
        fields = ['id', 'username', 'profilePicture']
        read_only_fields = fields


class UserRegistrationSerializer(serializers.Serializer):
    """Input for user registration."""

    username = serializers.CharField(max_length=50)
    email = serializers.EmailField(max_length=255)
    password = serializers.CharField(
        write_only=True,
        validators=[validate_password],
        style={'input_type': 'password'}
    )


class UserLoginSerializer(serializers.Serializer):
    """Input for user login."""

    email = serializers.EmailField(required=True)
    password = serializers.CharField(
        required=True,
        write_only=True,
        style={'input_type': 'password'}
    )


class ProfileUpdateSerializer(serializers.Serializer):
    """Input for profile updates. All fields optional."""

    username = serializers.CharField(max_length=50, required=False)
    email = serializers.EmailField(max_length=255, required=False)
    profilePicture = serializers.CharField(
        source='profile_picture',
        max_length=500,
        required=False,
        allow_blank=True,
    )
