# jobs/forms.py
from django import forms
from django.apps import apps

from .exceptions import InvalidFile
from .models import ApplicantFields, JobFields, JOB_TYPE_CHOICES


class JobForm(forms.Form):
    """
    Admin create/edit form. Every field is optional; whatever is missing is
    stored as an empty string (type falls back to Full-time).
    """
    title = forms.CharField(required=False)
    company = forms.CharField(required=False)
    location = forms.CharField(required=False)
    type = forms.CharField(required=False, help_text="Full-time, Part-time, Contract or Temporary")
    rate = forms.CharField(required=False)
    deadline = forms.CharField(required=False, widget=forms.TextInput(attrs={'type': 'date'}))
    description = forms.CharField(required=False, widget=forms.Textarea(attrs={'rows': 5}))

    type_choices = JOB_TYPE_CHOICES

    @classmethod
    def for_job(cls, job):
        return cls(initial={name: getattr(job, name) for name in cls.base_fields})

    def to_fields(self):
        return JobFields.from_mapping(self.cleaned_data)


class ApplyForm(forms.Form):
    name = forms.CharField(required=False)
    email = forms.CharField(required=False)
    phone = forms.CharField(required=False)
    experience = forms.CharField(required=False)
    cv = forms.CharField(required=False, help_text="Link to your CV (Drive, Dropbox, etc.)")
    note = forms.CharField(required=False, widget=forms.Textarea(attrs={'rows': 4}))
    cvFile = forms.FileField(required=False)

    def clean_cvFile(self):
        f = self.cleaned_data.get('cvFile')
        if not f:
            return f
        try:
            apps.get_app_config('jobs').cv_storage.validate(f)
        except InvalidFile as e:
            raise forms.ValidationError(str(e))
        return f

    def to_fields(self):
        data = self.cleaned_data
        return ApplicantFields(
            name=data.get('name', ''),
            email=data.get('email', ''),
            phone=data.get('phone', ''),
            experience=data.get('experience', ''),
            cv=data.get('cv', ''),
            note=data.get('note', ''),
        )

