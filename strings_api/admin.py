from django.contrib import admin
from .models import StringRecord


@admin.register(StringRecord)
class StringRecordAdmin(admin.ModelAdmin):
    """
    Read-only admin for stored strings; records are never edited or removed
    """
    list_display = [
        'value',
        'length',
        'is_palindrome',
        'unique_characters',
        'word_count',
        'created_at'
    ]
    list_filter = ['is_palindrome', 'word_count', 'created_at']
    search_fields = ['value', 'sha256_hash']
    ordering = ['-created_at']

    fieldsets = (
        ('Value', {
            'fields': ('id', 'value')
        }),
        ('Properties', {
            'fields': ('length', 'is_palindrome', 'unique_characters', 'word_count',
                       'sha256_hash', 'character_frequency_map')
        }),
        ('Metadata', {
            'fields': ('created_at',),
            'classes': ('collapse',)
        }),
    )

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
