from django.contrib import admin

from subscriptions.models import Payment, Student, Subscription


class SubscriptionInline(admin.TabularInline):
    model = Subscription
    extra = 0


class PaymentInline(admin.TabularInline):
    model = Payment
    extra = 0
    fields = ["number", "kind", "paid_date", "total", "total_paid", "payer"]
    readonly_fields = fields


@admin.register(Student)
class StudentAdmin(admin.ModelAdmin):
    list_display = ["first_name", "last_name", "document", "email", "created_at"]
    search_fields = ["first_name", "last_name", "document", "email"]
    inlines = [SubscriptionInline]


@admin.register(Subscription)
class SubscriptionAdmin(admin.ModelAdmin):
    list_display = ["student", "created_at", "expires_at"]
    list_filter = ["expires_at"]
    inlines = [PaymentInline]


@admin.register(Payment)
class PaymentAdmin(admin.ModelAdmin):
    list_display = ["number", "kind", "subscription", "total", "total_paid", "paid_date"]
    list_filter = ["kind"]
    search_fields = ["number", "payer", "payer_document"]
