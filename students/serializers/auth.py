from rest_framework import serializers

# bcrypt only looks at the first 72 bytes of a password
PASSWORD_MAX_LENGTH = 72


def _clean(v):
    return (v or '').strip()


def _bcrypt_safe(v):
    if len(v.encode('utf-8')) > PASSWORD_MAX_LENGTH:
        raise serializers.ValidationError(f'Password must be at most {PASSWORD_MAX_LENGTH} bytes')
    return v


class RegisterSerializer(serializers.Serializer):
    fullName = serializers.CharField(max_length=255)
    email = serializers.EmailField(max_length=255)
    password = serializers.CharField(max_length=PASSWORD_MAX_LENGTH, write_only=True, trim_whitespace=False)
    phoneNumber = serializers.CharField(max_length=64)
    parentContact = serializers.CharField(max_length=255)
    dob = serializers.DateField()
    highSchool = serializers.CharField(max_length=255)

    def validate_password(self, v):
        return _bcrypt_safe(v)

    def validate_fullName(self, v):
        v = _clean(v)
        if not v:
            raise serializers.ValidationError('Full name is required')
        return v

    def validate_highSchool(self, v):
        return _clean(v)

    def validate_parentContact(self, v):
        return _clean(v)

    def validate_phoneNumber(self, v):
        return _clean(v)


class LoginSerializer(serializers.Serializer):
    email = serializers.CharField(max_length=255)
    password = serializers.CharField(max_length=PASSWORD_MAX_LENGTH, trim_whitespace=False)

    def validate_password(self, v):
        return _bcrypt_safe(v)


class AdminAccessSerializer(serializers.Serializer):
    # Password is declared first so a missing one is the reported error.
    password = serializers.CharField(
        max_length=PASSWORD_MAX_LENGTH,
        trim_whitespace=False,
        error_messages={'required': 'Password is required', 'blank': 'Password is required',
                        'null': 'Password is required'},
    )
    email = serializers.EmailField(
        max_length=255,
        error_messages={'required': 'Email is required', 'blank': 'Email is required'},
    )

    def validate_password(self, v):
        return _bcrypt_safe(v)
