from user.models import User


def authenticate_user(email, password):
    if not email or not password:
        return None
    try:
        user = User.objects.get(email=email.lower())
    except User.DoesNotExist:
        return None

    if not user.is_active:
        return None
    if user.check_password(password):
        return user
    return None
