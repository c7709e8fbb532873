# accounts/forms.py
from django import forms

from jobs.exceptions import InvalidCredential
from .auth import check_admin_identifier


class AdminLoginForm(forms.Form):
    # plain text: any identifier is accepted and compared, not format-checked
    email = forms.CharField(required=False, max_length=254)

    def clean_email(self):
        try:
            return check_admin_identifier(self.cleaned_data.get('email'))
        except InvalidCredential as e:
            raise forms.ValidationError(str(e))
