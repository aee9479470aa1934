import django_filters

from .models import Table


class TableFilter(django_filters.FilterSet):
    status = django_filters.ChoiceFilter(choices=Table.Status.choices)

    class Meta:
        model = Table
        fields = ["status"]
