# -*- coding: utf-8 -*-
# Generated by the protocol buffer compiler.  DO NOT EDIT!
# source: evops/api/v1/api.proto
"""Generated protocol buffer code."""
from google.protobuf.internal import builder as _builder
from google.protobuf import descriptor as _descriptor
from google.protobuf import descriptor_pool as _descriptor_pool
from google.protobuf import symbol_database as _symbol_database
# @@protoc_insertion_point(imports)

_sym_db = _symbol_database.Default()




DESCRIPTOR = _descriptor_pool.Default().AddSerializedFile(b'\n\x16\x65vops/api/v1/api.proto\x12\x0c\x65vops.api.v1\" \n\x04User\x12\n\n\x02id\x18\x01 \x01(\t\x12\x0c\n\x04name\x18\x02 \x01(\t\"\x1b\n\x0bNewUserForm\x12\x0c\n\x04name\x18\x01 \x01(\t\"0\n\x03Tag\x12\n\n\x02id\x18\x01 \x01(\t\x12\x0c\n\x04name\x18\x02 \x01(\t\x12\x0f\n\x07\x61liases\x18\x03 \x03(\t\"+\n\nNewTagForm\x12\x0c\n\x04name\x18\x01 \x01(\t\x12\x0f\n\x07\x61liases\x18\x02 \x03(\t\"\x87\x01\n\x05\x45vent\x12\n\n\x02id\x18\x01 \x01(\t\x12\x11\n\tauthor_id\x18\x02 \x01(\t\x12\r\n\x05title\x18\x03 \x01(\t\x12\x13\n\x0b\x64\x65scription\x18\x04 \x01(\t\x12\x0f\n\x07tag_ids\x18\x05 \x03(\t\x12\x17\n\x0fwith_attendance\x18\x06 \x01(\x08\x12\x11\n\timage_ids\x18\x07 \x03(\t\"o\n\x0cNewEventForm\x12\x11\n\tauthor_id\x18\x01 \x01(\t\x12\r\n\x05title\x18\x02 \x01(\t\x12\x13\n\x0b\x64\x65scription\x18\x03 \x01(\t\x12\x0f\n\x07tag_ids\x18\x04 \x03(\t\x12\x17\n\x0fwith_attendance\x18\x05 \x01(\x08\"C\n\x18UserServiceCreateRequest\x12\'\n\x04\x66orm\x18\x01 \x01(\x0b\x32\x19.evops.api.v1.NewUserForm\",\n\x19UserServiceCreateResponse\x12\x0f\n\x07user_id\x18\x01 \x01(\t\"$\n\x16UserServiceFindRequest\x12\n\n\x02id\x18\x01 \x01(\t\";\n\x17UserServiceFindResponse\x12 \n\x04user\x18\x01 \x01(\x0b\x32\x12.evops.api.v1.User\"A\n\x17TagServiceCreateRequest\x12&\n\x04\x66orm\x18\x01 \x01(\x0b\x32\x18.evops.api.v1.NewTagForm\"*\n\x18TagServiceCreateResponse\x12\x0e\n\x06tag_id\x18\x01 \x01(\t\"#\n\x15TagServiceFindRequest\x12\n\n\x02id\x18\x01 \x01(\t\"8\n\x16TagServiceFindResponse\x12\x1e\n\x03tag\x18\x01 \x01(\x0b\x32\x11.evops.api.v1.Tag\"E\n\x19\x45ventServiceCreateRequest\x12(\n\x04\x66orm\x18\x01 \x01(\x0b\x32\x1a.evops.api.v1.NewEventForm\".\n\x1a\x45ventServiceCreateResponse\x12\x10\n\x08\x65vent_id\x18\x01 \x01(\t\"%\n\x17\x45ventServiceFindRequest\x12\n\n\x02id\x18\x01 \x01(\t\">\n\x18\x45ventServiceFindResponse\x12\"\n\x05\x65vent\x18\x01 \x01(\x0b\x32\x13.evops.api.v1.Event2\xbd\x01\n\x0bUserService\x12Y\n\x06\x43reate\x12&.evops.api.v1.UserServiceCreateRequest\x1a\'.evops.api.v1.UserServiceCreateResponse\x12S\n\x04\x46ind\x12$.evops.api.v1.UserServiceFindRequest\x1a%.evops.api.v1.UserServiceFindResponse2\xb8\x01\n\nTagService\x12W\n\x06\x43reate\x12%.evops.api.v1.TagServiceCreateRequest\x1a&.evops.api.v1.TagServiceCreateResponse\x12Q\n\x04\x46ind\x12#.evops.api.v1.TagServiceFindRequest\x1a$.evops.api.v1.TagServiceFindResponse2\xc2\x01\n\x0c\x45ventService\x12[\n\x06\x43reate\x12\'.evops.api.v1.EventServiceCreateRequest\x1a(.evops.api.v1.EventServiceCreateResponse\x12U\n\x04\x46ind\x12%.evops.api.v1.EventServiceFindRequest\x1a&.evops.api.v1.EventServiceFindResponseb\x06proto3')

_builder.BuildMessageAndEnumDescriptors(DESCRIPTOR, globals())
_builder.BuildTopDescriptorsAndMessages(DESCRIPTOR, 'evops.api.v1.api_pb2', globals())
if _descriptor._USE_C_DESCRIPTORS == False:

  DESCRIPTOR._options = None
  _USER._serialized_start=40
  _USER._serialized_end=72
  _NEWUSERFORM._serialized_start=74
  _NEWUSERFORM._serialized_end=101
  _TAG._serialized_start=103
  _TAG._serialized_end=151
  _NEWTAGFORM._serialized_start=153
  _NEWTAGFORM._serialized_end=196
  _EVENT._serialized_start=199
  _EVENT._serialized_end=334
  _NEWEVENTFORM._serialized_start=336
  _NEWEVENTFORM._serialized_end=447
  _USERSERVICECREATEREQUEST._serialized_start=449
  _USERSERVICECREATEREQUEST._serialized_end=516
  _USERSERVICECREATERESPONSE._serialized_start=518
  _USERSERVICECREATERESPONSE._serialized_end=562
  _USERSERVICEFINDREQUEST._serialized_start=564
  _USERSERVICEFINDREQUEST._serialized_end=600
  _USERSERVICEFINDRESPONSE._serialized_start=602
  _USERSERVICEFINDRESPONSE._serialized_end=661
  _TAGSERVICECREATEREQUEST._serialized_start=663
  _TAGSERVICECREATEREQUEST._serialized_end=728
  _TAGSERVICECREATERESPONSE._serialized_start=730
  _TAGSERVICECREATERESPONSE._serialized_end=772
  _TAGSERVICEFINDREQUEST._serialized_start=774
  _TAGSERVICEFINDREQUEST._serialized_end=809
  _TAGSERVICEFINDRESPONSE._serialized_start=811
  _TAGSERVICEFINDRESPONSE._serialized_end=867
  _EVENTSERVICECREATEREQUEST._serialized_start=869
  _EVENTSERVICECREATEREQUEST._serialized_end=938
  _EVENTSERVICECREATERESPONSE._serialized_start=940
  _EVENTSERVICECREATERESPONSE._serialized_end=986
  _EVENTSERVICEFINDREQUEST._serialized_start=988
  _EVENTSERVICEFINDREQUEST._serialized_end=1025
  _EVENTSERVICEFINDRESPONSE._serialized_start=1027
  _EVENTSERVICEFINDRESPONSE._serialized_end=1089
  _USERSERVICE._serialized_start=1092
  _USERSERVICE._serialized_end=1281
  _TAGSERVICE._serialized_start=1284
  _TAGSERVICE._serialized_end=1468
  _EVENTSERVICE._serialized_start=1471
  _EVENTSERVICE._serialized_end=1665
# @@protoc_insertion_point(module_scope)
