from django.contrib import admin

from bookings.models import Booking, Event, TimeSlot, Venue


class TimeSlotInline(admin.TabularInline):
    model = TimeSlot
    extra = 1


class BookingInline(admin.TabularInline):
    model = Booking
    extra = 0
    can_delete = False
    readonly_fields = ["event", "quantity", "price", "booked_at"]

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(Venue)
class VenueAdmin(admin.ModelAdmin):
    list_display = ["name", "city", "country"]
    search_fields = ["name", "city"]


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ["name", "price", "venue", "created_at"]
    search_fields = ["name"]
    inlines = [TimeSlotInline]


@admin.register(TimeSlot)
class TimeSlotAdmin(admin.ModelAdmin):
    list_display = ["title", "event", "starts_at", "capacity", "price"]
    list_filter = ["event"]
    inlines = [BookingInline]


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = ["time_slot", "event", "quantity", "price", "booked_at"]
    list_filter = ["event"]
    readonly_fields = ["event", "time_slot", "quantity", "price", "booked_at"]
