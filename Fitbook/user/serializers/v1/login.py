from rest_framework import serializers

from user.validators import authenticate_user


class UserLoginSerializer(serializers.Serializer):
    email = serializers.EmailField(required=True)
    password = serializers.CharField(max_length=255, write_only=True)

    def validate(self, attrs):
        user = authenticate_user(attrs.get("email"), attrs.get("password"))
        if not user:
            raise serializers.ValidationError("Invalid email or password")

        attrs['user'] = user
        return attrs
