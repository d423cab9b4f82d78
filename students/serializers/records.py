from rest_framework import serializers


class ProjectSerializer(serializers.Serializer):
    projectName = serializers.CharField(max_length=255)
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=1024)

    def validate_projectName(self, v):
        v = (v or '').strip()
        if not v:
            raise serializers.ValidationError('Project name is required')
        return v

    def validate_description(self, v):
        if v is None:
            return None
        return v.strip()


class IncomeSerializer(serializers.Serializer):
    # null clears a previous report
    income = serializers.FloatField(allow_null=True)


class CodingScoreSerializer(serializers.Serializer):
    score = serializers.FloatField()
