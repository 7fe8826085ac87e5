"""
Settings form for the Hello Homer admin page.
"""
from django import forms
from django.utils.translation import gettext_lazy as _

from .options import CACHE_DURATION_CHOICES, NO, YES, HomerSettings

YES_NO_CHOICES = [
    (YES, _("Yes")),
    (NO, _("No")),
]


class HomerSettingsForm(forms.Form):
    show_image = forms.ChoiceField(label=_("Show Screenshot"), choices=YES_NO_CHOICES)
    show_episode = forms.ChoiceField(label=_("Show Episode Info"), choices=YES_NO_CHOICES)
    cache_time = forms.TypedChoiceField(
        label=_("Cache Duration"),
        choices=CACHE_DURATION_CHOICES,
        coerce=int,
    )

    @classmethod
    def from_settings(cls, homer_settings):
        """Build an unbound form showing the current settings."""
        return cls(
            initial={
                "show_image": YES if homer_settings.show_image else NO,
                "show_episode": YES if homer_settings.show_episode else NO,
                "cache_time": homer_settings.cache_duration_seconds,
            }
        )

    def to_settings(self):
        """Return the validated form data as HomerSettings."""
        data = self.cleaned_data
        return HomerSettings(
            show_image=data["show_image"] == YES,
            show_episode=data["show_episode"] == YES,
            cache_duration_seconds=data["cache_time"],
        )
